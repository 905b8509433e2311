"""Client UI: API client, sequential batch runner, and Streamlit page."""
