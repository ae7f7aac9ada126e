"""
Shared service utilities.

- http.py   - requests session with retry/backoff for outbound API calls
"""
