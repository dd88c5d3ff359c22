# institute_admin/__init__.py
"""
Institute Administration - shared package

This package contains:
- config: Configuration management (local .env + Streamlit Cloud secrets)
- dashboard: Management dashboard (period metrics, monthly series,
  payment risk, generic sortable/searchable tables)

Usage:
    from institute_admin.config import config
    from institute_admin.dashboard import DashboardProcessor, make_period
"""

__version__ = '1.0.0'
