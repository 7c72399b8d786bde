"""Client-side service layer and Streamlit front end for the wood inventory API."""
