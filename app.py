"""
ReviewSense - Streamlit Application Entry Point
"""

import streamlit as st

from reviewsense.core import ReviewAnalystError, setup_logging
from reviewsense.service import ReviewAnalysisService
from reviewsense.utils.config import get_settings

st.set_page_config(
    page_title="ReviewSense",
    page_icon="🛒",
    layout="wide",
)


@st.cache_resource
def get_service() -> ReviewAnalysisService:
    settings = get_settings()
    setup_logging(settings.log_level)
    return ReviewAnalysisService(settings)


def run(analysis, *args):
    try:
        report = analysis(*args)
    except ReviewAnalystError as e:
        st.warning(e.message)
        if e.suggestion:
            st.caption(e.suggestion)
        return
    st.json(report.to_dict())


def main():
    st.title("🛒 ReviewSense")
    st.markdown("> Pros, cons, themes and a verdict from a pile of product reviews.")
    st.markdown("---")

    service = get_service()
    text_tab, file_tab, url_tab = st.tabs(["Paste reviews", "Upload file", "Product URL"])

    with text_tab:
        raw_text = st.text_area("One review per line", height=240)
        if st.button("Analyze text", type="primary"):
            run(service.analyze_text, raw_text)

    with file_tab:
        upload = st.file_uploader("CSV, JSON or TXT", type=["csv", "json", "txt"])
        if upload is not None and st.button("Analyze file", type="primary"):
            run(service.analyze_file, upload.name, upload.getvalue(), upload.type)

    with url_tab:
        url = st.text_input("Product URL", placeholder="https://www.amazon.com/dp/...")
        if st.button("Analyze URL", type="primary"):
            run(service.analyze_url, url)


if __name__ == "__main__":
    main()
