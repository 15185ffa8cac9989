"""
Test Suite for Space Telemetry

This module contains tests for:
- Telemetry generation (test_generator.py)
- Store gateway (test_database.py)
- API endpoints (test_api.py)
- Dashboard feed and charts (test_dashboard.py)

Run tests with:
    pytest tests/ -v
    pytest tests/ --cov=api --cov=engine
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
