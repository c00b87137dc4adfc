"""Streamlit showroom for the Comfort digital catalogue.

Run with: streamlit run catalogue/showroom/app.py
"""
