from toylisp.builtin.env_builtin import PrimitiveRegistry, default_registry, register

__all__ = ["PrimitiveRegistry", "default_registry", "register"]
