"""DS-Jobs Cleaning Package.

This package contains the services for the Glassdoor data-science job
postings dataset:
- cleaner: Turns raw job postings into a typed, analysis-ready dataset
- common: Small helpers shared across services (job family extraction)
"""

__version__ = "0.1.0"
