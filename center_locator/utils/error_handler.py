"""Centralized error handling for Streamlit pages."""
import functools
import traceback
from typing import Callable

import streamlit as st

from center_locator.utils.logging import log_error


def handle_streamlit_errors(show_details: bool = True, reraise: bool = False):
    """
    Decorator to handle errors in Streamlit pages.
    
    Args:
        show_details: Whether to show error details in expander
        reraise: Whether to re-raise the exception (for development)
    
    Usage:
        @handle_streamlit_errors()
        def render_page():
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                log_error(e, {
                    "module": func.__module__,
                    "function": func.__name__,
                    "streamlit_page": True,
                })
                
                st.error(f"❌ An error occurred: {str(e)}")
                
                if show_details:
                    with st.expander("🔍 Error Details", expanded=False):
                        st.code(traceback.format_exc(), language="python")
                        st.json({
                            "module": func.__module__,
                            "function": func.__name__,
                            "error_type": type(e).__name__,
                        })
                
                if reraise:
                    raise
        
        return wrapper
    return decorator
