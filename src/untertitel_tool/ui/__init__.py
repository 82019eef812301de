"""
Streamlit-UI.

- state: Zustandsübergänge auf st.session_state (ohne Streamlit testbar)
- components: Auswahlkarten, Theme und Browser-Integrationen
"""
