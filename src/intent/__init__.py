"""Intent extraction and enrichment.

The intent layer turns an untrusted model response into an `Intent` object, completes it with
deterministic rules over the user's own words, and hands it to the GraphQL builder.
"""
