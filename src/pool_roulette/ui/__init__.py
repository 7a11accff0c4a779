"""Streamlit presentation layer for Pool Roulette."""
