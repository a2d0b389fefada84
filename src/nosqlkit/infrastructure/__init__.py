"""Infrastructure adapters: file storage, code generation and MongoDB."""
