"""
Shop search-and-annotate pipeline.

Responsibilities:
- Describe each directory shop and embed it in the business-dinner evaluation prompt.
- Annotate shops one at a time with a fixed pause between generation calls.
- Keep a failed annotation on one shop from affecting the others.
"""
