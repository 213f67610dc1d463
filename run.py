#!/usr/bin/env python
"""
Admissions API launcher

Usage:
    python run.py                    # default (127.0.0.1:8000)
    python run.py -p 8080            # custom port
    python run.py --host 0.0.0.0     # listen on all interfaces
    python run.py --reload           # hot reload
"""
import argparse
import sys
from pathlib import Path

# Make sure the repository root is importable
ROOT_DIR = Path(__file__).parent
sys.path.insert(0, str(ROOT_DIR))


def parse_args():
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Admissions API launcher",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-p", "--port",
        type=int,
        default=8000,
        help="port (default: 8000)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="host (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="enable hot reload (development)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="worker processes (default: 1)"
    )
    return parser.parse_args()


def check_env():
    """Check the environment before starting"""
    env_file = ROOT_DIR / ".env"
    env_example = ROOT_DIR / ".env.example"
    
    if not env_file.exists():
        if env_example.exists():
            print("No .env found, copying .env.example ...")
            import shutil
            shutil.copy(env_example, env_file)
            print(".env created, adjust it as needed")
        else:
            print("No .env found, using default settings")
    
    # SQLite database directory
    data_dir = ROOT_DIR / "data"
    if not data_dir.exists():
        data_dir.mkdir(parents=True)
        print(f"Data directory created: {data_dir}")


def main():
    """Entry point"""
    args = parse_args()
    
    print("=" * 50)
    print("  Admissions API")
    print("=" * 50)
    
    check_env()
    
    print("\nStarting server...")
    print(f"   Address: http://{args.host}:{args.port}")
    print(f"   Docs: http://{args.host}:{args.port}/docs")
    print(f"   Reload: {'on' if args.reload else 'off'}")
    print(f"   Workers: {args.workers}")
    print("\n" + "-" * 50 + "\n")
    
    try:
        import uvicorn
        uvicorn.run(
            "admissions.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            workers=args.workers if not args.reload else 1,
            log_level="info",
        )
    except KeyboardInterrupt:
        print("\nServer stopped")


if __name__ == "__main__":
    main()
