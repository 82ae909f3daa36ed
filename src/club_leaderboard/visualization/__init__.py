"""Plotly chart generators."""
