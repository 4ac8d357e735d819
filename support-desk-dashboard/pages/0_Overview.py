import plotly.express as px
import pandas as pd
import streamlit as st

from supportdesk import services
from supportdesk.admin_client import AdminAPIError
from supportdesk.models import STATUSES
from supportdesk.stats import task_stats
from supportdesk.table.badges import STATUS_STYLES, status_label
from supportdesk.ui.common import bootstrap, page_header, stat_cards

backend = bootstrap()

page_header("Dashboard", "Overview of support tasks and the team")

try:
    tasks = services.fetch_tasks(backend)
    reps = services.fetch_representatives(backend)
except AdminAPIError as exc:
    st.error(f"Could not load dashboard data: {exc.message}")
    tasks, reps = [], []

stats = task_stats(tasks, reps)
stat_cards([
    ("Total Tasks", stats.total_tasks),
    ("Completed", stats.completed_tasks),
    ("Pending", stats.pending_tasks),
    ("Team Members", stats.team_members),
])

st.subheader("Tasks by status")
if stats.total_tasks:
    df = pd.DataFrame(
        [{"status": status_label(s), "count": n} for s, n in stats.by_status.items() if n]
    )
    colors = {status_label(s): STATUS_STYLES[s].color for s in STATUSES}
    fig = px.pie(df, names="status", values="count", hole=0.45, color="status", color_discrete_map=colors)
    fig.update_layout(margin=dict(t=10, b=10, l=10, r=10), height=320)
    st.plotly_chart(fig, use_container_width=True)
else:
    st.caption("No tasks yet.")
