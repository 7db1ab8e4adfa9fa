"""Student directory backend.

This package exposes the service, repository and model modules used by
the FastAPI application in `student_directory.main`. The student
collection lives in memory and is lost when the process exits.
"""
