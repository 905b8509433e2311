"""
Literature Review Assistant UI.

Streamlit page: enter a research topic, upload PDFs, analyze them one by
one through the API, and show a summary card per paper.

Run with: streamlit run paper_analyzer/ui/app.py

Dependencies: streamlit, paper_analyzer.ui
System role: Client UI
"""

import streamlit as st

from paper_analyzer.ui.api_client import AnalyzerClient
from paper_analyzer.ui.batch import (
    BatchAnalyzer,
    BatchState,
    Notification,
    NotificationLevel,
    PaperFile,
    accept_pdf_files,
)

APP_TITLE = "Literature Review Assistant"

RESULT_SECTIONS = (
    ("Aim/Purpose", "aim"),
    ("Methodology", "methodology"),
    ("Results", "results"),
    ("Scope", "scope"),
    ("Relevance to Topic", "relevance"),
)


def show_notification(notification: Notification) -> None:
    icon = "✅" if notification.level == NotificationLevel.SUCCESS else "⚠️"
    st.toast(f"**{notification.title}**: {notification.description}", icon=icon)


@st.cache_resource
def get_client() -> AnalyzerClient:
    return AnalyzerClient()


def init_state() -> None:
    if "results" not in st.session_state:
        st.session_state.results = []
    if "is_analyzing" not in st.session_state:
        st.session_state.is_analyzing = False


def render_results() -> None:
    if not st.session_state.results:
        return

    st.header("Analysis Results")
    for result in st.session_state.results:
        with st.container(border=True):
            st.subheader(result.file_name)
            for label, attr in RESULT_SECTIONS:
                st.markdown(f"**{label}:**")
                st.write(getattr(result, attr))


st.set_page_config(page_title=APP_TITLE, page_icon="📄", layout="centered")
init_state()

st.title(APP_TITLE)

topic = st.text_input(
    "Research Topic",
    placeholder="Enter your research topic...",
)

uploaded = st.file_uploader(
    "Drag & drop PDF files here, or click to select files",
    type=["pdf"],
    accept_multiple_files=True,
)
files = accept_pdf_files(
    [PaperFile(name=f.name, content=f.getvalue(), mime_type=f.type or "") for f in uploaded or []]
)

if files:
    st.markdown("**Uploaded Files:**")
    for paper in files:
        st.markdown(f"- 📄 {paper.name}")

clicked = st.button(
    "Analyze Papers",
    disabled=st.session_state.is_analyzing or not topic or not files,
    use_container_width=True,
)

if clicked:
    st.session_state.is_analyzing = True
    try:
        with st.spinner("Analyzing..."):
            outcome = BatchAnalyzer(get_client(), show_notification).run(files, topic)
        if outcome.state == BatchState.DONE:
            st.session_state.results = outcome.results
    finally:
        st.session_state.is_analyzing = False

render_results()
