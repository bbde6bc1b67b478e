"""
Package marker for source code under `src`.
It groups the query API and shared helpers under a stable import path.
Most functionality lives in the sibling modules; this file intentionally stays lightweight.
"""
