"""
WorldScribe content repository.

Manages Worlds (a SQLite database plus an uploads folder) and the categories,
articles, connections and snippets stored inside them.
"""
