from pairlisp.builtin.env_builtin import register, global_environment, PRIMITIVES

__all__ = ["register", "global_environment", "PRIMITIVES"]
