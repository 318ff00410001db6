"""
Streamlit page for the 摸鱼办 reminder.
Shows the clock, off-work countdown, work progress and the copyable report,
refreshed from a fresh reference instant every few seconds.
"""

import logging
import random
from datetime import datetime

import streamlit as st

import countdown
import report
from config import Settings, load_settings
from tables import is_curated_year

logger = logging.getLogger(__name__)


def opening_strategy(settings: Settings) -> report.SelectionStrategy:
    """
    Strategy for the current session.
    Random picks reuse a per-session seed so the text only changes on reshuffle.
    """
    if settings.opening_strategy == 'random':
        seed = st.session_state.setdefault("report_seed", random.randrange(1 << 30))
        return report.RandomSelection(random.Random(seed))
    return report.make_strategy(settings.opening_strategy)


def render_header(now: datetime, settings: Settings):
    left, right = st.columns([2, 3])
    with left:
        st.metric("当前时间", countdown.format_clock(now))
    with right:
        st.markdown(f"**{countdown.format_work_end_countdown(now, settings.work_end)}**")
        percent = countdown.work_progress_percent(now, settings.work_start, settings.work_end)
        st.progress(percent, text=f"今日工作进度 {percent}%")


def render_report(now: datetime, settings: Settings):
    text = report.generate_report(now, opening_strategy(settings), settings)
    st.code(text, language=None)

    if not is_curated_year(now.year):
        st.caption(f"{now.year}年暂无农历节日数据，仅显示元旦、劳动节和国庆。")


def render_dashboard(settings: Settings):
    now = datetime.now()
    try:
        render_header(now, settings)
        render_report(now, settings)
    except Exception as e:
        logger.exception("Failed to render reminder")
        st.error(f"Error rendering reminder: {e}")


def main():
    """Main application function."""
    st.set_page_config(page_title="摸鱼办提醒", page_icon="🐟")
    st.title("🐟 摸鱼办提醒")

    settings = load_settings()

    if settings.opening_strategy == 'random':
        if st.button("🔀 换一条开场白"):
            st.session_state["report_seed"] = random.randrange(1 << 30)

    st.fragment(run_every=settings.refresh_seconds)(render_dashboard)(settings)

    st.markdown("---")
    st.caption("点击文本框右上角的复制按钮即可复制提醒内容。")


if __name__ == "__main__":
    main()
