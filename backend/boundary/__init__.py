"""
Boundary layer for external system integrations.

Handles all interactions with external services (the Gemini generation API).
Provides clients that translate domain requests into SDK calls.
"""
