# =============================================================================
# Interview Prep Backend - Backend Package
# =============================================================================
"""
Interview Prep Backend

A FastAPI-based backend service for the interview-practice coaching app.
Turns a job posting URL into the structured job data used to set up a
practice interview.
"""

__version__ = "0.1.0"
