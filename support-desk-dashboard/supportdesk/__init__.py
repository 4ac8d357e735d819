"""Support desk admin dashboard.

Streamlit dashboard for managing support tasks, representatives and customer
records. The task table pipeline lives in :mod:`supportdesk.table`.
"""

__version__ = "0.1.0"
