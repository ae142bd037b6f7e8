"""Domain layer — symbol table, tokenizer, masks, and duration rules.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
