"""
Codegen building blocks shared by the generators.

    ident     — identifier grammar and runtime-config identifiers
    renderer  — template renderer protocol + Jinja2 implementation
"""
