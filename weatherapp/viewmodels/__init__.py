"""ViewModel package for UI state and command surfaces.

Call context:
    ``weatherapp/app/main.py`` imports the concrete viewmodels from this
    package to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types and lightweight formatting
    helpers only. I/O adapters and use-case orchestration remain outside.

Responsibilities:
    - Expose mutable UI state and command intent callbacks.
    - Map the query outcome to the branch the page renders.
    - Keep MVVM boundaries explicit by avoiding transport or persistence logic.
"""
