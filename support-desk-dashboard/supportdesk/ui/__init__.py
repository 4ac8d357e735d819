"""Streamlit widgets shared by the dashboard pages."""
