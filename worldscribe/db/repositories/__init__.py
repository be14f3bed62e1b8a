"""
Per-entity repository modules for World database access.

Functions take an open ``Session`` (and the World's ``ImageStore`` where image
files are involved). Writes commit on success and roll back on failure; image
files are only deleted after the database commit has gone through.
"""
