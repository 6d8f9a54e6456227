"""Question answering pipeline.

Turns a free-text question into prose: model intent -> enriched Intent -> GraphQL -> formatted rows.
"""
