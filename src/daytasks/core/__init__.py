"""
Application core.

Components:
- ports.py: Protocols the core depends on (PreferenceRepo)
- theme.py: observable theme state backed by the stored preference
- state.py: AppState and its composition root
"""
