"""
Shared plumbing for the datasource clients.

- http.py       - requests session, rate-limited GET with error wrapping
- ratelimit.py  - per-source minimum-interval limiter
"""
