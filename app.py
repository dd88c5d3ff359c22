# app.py
"""
Institute Admin Dashboard - Main Entry Point

Version: 1.0.0
"""

import streamlit as st
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

from institute_admin.config import config
from institute_admin.dashboard import DashboardDataLoader, DataSourceError

# ==================== PAGE CONFIGURATION ====================

APP_NAME = "Institute Admin"
APP_ICON = "🎓"
APP_VERSION = "1.0.0"

st.set_page_config(
    page_title=f"{APP_NAME} - Dashboard",
    page_icon=APP_ICON,
    layout="wide",
    initial_sidebar_state="expanded"
)

# ==================== CUSTOM CSS ====================

st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        margin-bottom: 0.5rem;
        color: #1f77b4;
    }

    .sub-header {
        font-size: 1.1rem;
        color: #666;
        margin-bottom: 2rem;
    }

    .info-card {
        background: #f8f9fa;
        padding: 1.5rem;
        border-radius: 0.5rem;
        border-left: 4px solid #1f77b4;
        margin-bottom: 1rem;
    }

    .footer {
        text-align: center;
        color: #888;
        padding: 1rem;
        margin-top: 3rem;
        border-top: 1px solid #eee;
        font-size: 0.9rem;
    }
</style>
""", unsafe_allow_html=True)


# ==================== MAIN ====================

def main():
    """Main application entry point"""
    st.markdown(f'<p class="main-header">{APP_ICON} {APP_NAME}</p>', unsafe_allow_html=True)
    st.markdown('<p class="sub-header">Students, staff, batches, fees and expenses at a glance</p>',
                unsafe_allow_html=True)

    # Data source status
    loader = DashboardDataLoader(
        config.data_file,
        ttl_seconds=config.get_app_setting("CACHE_TTL_SECONDS", 300),
    )
    try:
        data = loader.get_data()
    except DataSourceError as e:
        logger.error(f"Data source unavailable: {e}")
        st.error(f"⚠️ {e}")
        st.info("Set DATA_FILE in your .env (or Streamlit secrets) to a valid institute data file.")
        return

    counts = data.counts()
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Students", f"{counts['students']:,}")
        st.metric("Leads", f"{counts['leads']:,}")
    with col2:
        st.metric("Staff", f"{counts['staff']:,}")
        st.metric("Fee Payments", f"{counts['fee_payments']:,}")
    with col3:
        st.metric("Batches", f"{counts['batches']:,}")
        st.metric("Expenses", f"{counts['expenses']:,}")

    # Available pages info
    st.markdown("### 📊 Available Pages")

    st.markdown("""
    <div class="info-card">
        <strong>📊 Dashboard</strong><br>
        <span style="color: #666;">Period metrics, monthly revenue vs expenses, overdue and upcoming fee payments.</span>
    </div>
    <div class="info-card">
        <strong>📋 Records</strong><br>
        <span style="color: #666;">Searchable, sortable lists of students, staff, batches, leads, payments and expenses.</span>
    </div>
    """, unsafe_allow_html=True)

    if config.is_feature_enabled("DEBUG_MODE"):
        with st.expander("🔧 System Status"):
            st.json(config.get_data_source_config())

    # Footer
    st.markdown(f"""
    <div class="footer">
        <strong>{APP_NAME}</strong> v{APP_VERSION}
    </div>
    """, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
else:
    main()
