"""Gradio user interface for Imajinasi AI."""
