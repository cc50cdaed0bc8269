"""
Notes Client.

Async client for the notes API:

- http.APIClient     - httpx wrapper with base URL, frontend header, logging
- actions.NotesActions - one raising call per endpoint, dates parsed
- hook.NotesHook     - mirrored note list with loading/error state; never raises
"""
