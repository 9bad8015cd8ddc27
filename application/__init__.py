"""
Application Layer for the E-Tracker API.

This package contains:
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: ExerciseRecordStore and ExerciseQueryService
- exceptions: Errors shared by application and infrastructure layers
"""
