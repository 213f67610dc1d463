"""
Service layer

Visibility and query logic for applications, plus submission and wipe
"""
