"""
Live Code Audit: Streamlit application.
Scores the HTML, CSS and JavaScript of a deployed page.
"""
from __future__ import annotations

from datetime import datetime
from urllib.parse import urlparse

import streamlit as st

from analyzers.orchestrator import analyze
from models import AnalysisResult, AuditError, failure_payload
from reporting.exporter import feedback_to_df, scores_to_df, to_csv_bytes, to_json_bytes
from scoring.scorer import overall_score, score_color, score_label
from ui.charts import deductions_bar, score_gauge

_TITLES = {"html": "HTML", "css": "CSS", "javascript": "JavaScript"}

# ── Page config ────────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="Live Code Audit",
    page_icon="🧪",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
.block-container { padding-top: 1rem; }
.modebar { display: none !important; }
.sidebar-logo { font-size: 1.5rem; font-weight: 800; color: #6C63FF; margin-bottom: 0.5rem; }
</style>
""", unsafe_allow_html=True)


# ── State helpers ──────────────────────────────────────────────────────────────

def _clear_results():
    st.session_state.pop("analysis_result", None)


def _has_result() -> bool:
    return st.session_state.get("analysis_result") is not None


# ── Sidebar ────────────────────────────────────────────────────────────────────

def render_sidebar() -> str | None:
    with st.sidebar:
        st.markdown('<div class="sidebar-logo">🧪 Live Code Audit</div>', unsafe_allow_html=True)
        st.caption("HTML / CSS / JavaScript quality score")
        st.divider()

        url = st.text_input(
            "Live URL or GitHub repository",
            placeholder="https://example.com or https://github.com/user/repo",
        )

        if _has_result():
            if st.button("🔄 New Analysis", use_container_width=True):
                _clear_results()
                st.rerun()

        start = st.button("Analyze", type="primary", use_container_width=True)

    if start and url:
        url = url.strip()
        if not url.startswith("http"):
            url = "https://" + url
        return url
    return None


# ── Run analysis ───────────────────────────────────────────────────────────────

def run_analysis(url: str) -> None:
    progress_bar = st.progress(0)
    status_text = st.empty()

    def on_progress(update: dict):
        progress_bar.progress(min(update.get("pct", 0), 100))
        status_text.markdown(f"**{update.get('message', '')}**")

    with st.status("Analyzing…", expanded=True) as status_widget:
        try:
            result = analyze(url, progress_callback=on_progress)
        except AuditError as exc:
            status_widget.update(label="Analysis failed", state="error")
            payload = failure_payload(exc)
            st.error(f"{payload['error']} {payload['message']}")
            st.json(payload)
            return
        status_widget.update(label="Analysis complete!", state="complete")

    progress_bar.empty()
    status_text.empty()

    st.session_state.analysis_result = result
    st.rerun()


# ── Dashboard ──────────────────────────────────────────────────────────────────

def render_overview(result: AnalysisResult) -> None:
    cols = st.columns(3)
    for col, (name, report) in zip(cols, result.reports.items()):
        with col:
            st.plotly_chart(score_gauge(report.score, _TITLES[name]), use_container_width=True)
            st.markdown(
                f'<div style="text-align:center;font-weight:700;color:{score_color(report.score)}">'
                f'{score_label(report.score)}</div>',
                unsafe_allow_html=True,
            )

    st.divider()
    st.plotly_chart(deductions_bar(feedback_to_df(result)), use_container_width=True)


def render_feedback(result: AnalysisResult, name: str) -> None:
    report = result.reports[name]
    if not report.feedback:
        st.success(f"No {_TITLES[name]} issues found!")
        return
    for line in report.feedback:
        if line.startswith(("ERROR:", "WARNING:")):
            st.markdown(f"&nbsp;&nbsp;&nbsp;&nbsp;`{line}`")
        else:
            st.markdown(f"- {line}")


def render_export(result: AnalysisResult) -> None:
    stamp = datetime.now().strftime("%Y%m%d_%H%M")
    host = urlparse(result.resolved_url or result.url).netloc or "site"

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "Download Feedback (CSV)",
            data=to_csv_bytes(feedback_to_df(result)),
            file_name=f"feedback_{host}_{stamp}.csv",
            mime="text/csv",
            use_container_width=True,
        )
    with col2:
        st.download_button(
            "Download Result (JSON)",
            data=to_json_bytes(result.to_dict()),
            file_name=f"result_{host}_{stamp}.json",
            mime="application/json",
            use_container_width=True,
        )

    st.divider()
    st.dataframe(scores_to_df(result), use_container_width=True)


def render_landing() -> None:
    st.markdown("""
    <div style="text-align:center; padding: 4rem 2rem;">
        <div style="font-size:4rem">🧪</div>
        <h1 style="font-size:2.5rem; font-weight:800; color:#6C63FF; margin:0.5rem 0">Live Code Audit</h1>
        <p style="font-size:1.1rem; color:#888; max-width:600px; margin:0 auto 2rem">
            Fetches a deployed page with its stylesheets and scripts and grades
            the HTML, CSS and JavaScript against a fixed set of quality rules.
        </p>
    </div>
    """, unsafe_allow_html=True)


# ── Main ───────────────────────────────────────────────────────────────────────

def main():
    url = render_sidebar()

    if url is not None:
        _clear_results()
        run_analysis(url)
        return

    if not _has_result():
        render_landing()
        return

    result: AnalysisResult = st.session_state.analysis_result

    st.title(f"Audit: {result.resolved_url or result.url}")
    st.caption(f"Average score: **{overall_score(result.scores)}/100**")

    tabs = st.tabs(["Overview", "HTML", "CSS", "JavaScript", "Export"])
    with tabs[0]:
        render_overview(result)
    with tabs[1]:
        render_feedback(result, "html")
    with tabs[2]:
        render_feedback(result, "css")
    with tabs[3]:
        render_feedback(result, "javascript")
    with tabs[4]:
        render_export(result)


if __name__ == "__main__":
    main()
