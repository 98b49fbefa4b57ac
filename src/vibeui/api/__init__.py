"""VibeUI backend — FastAPI REST API layer.

This package contains the FastAPI application, the Pydantic request models,
the prompt builders, and the single-operator session gate.

Modules
-------
main
    ``create_app()`` factory, all route handlers and the ``main()`` CLI
    entry point.
models
    Pydantic models for request validation.
prompt_builder
    Mood-board and UI-preview prompt compilation.
auth
    Session gate, login and logout routes.
login_page
    Login page markup.
"""
