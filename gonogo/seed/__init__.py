from .loader import get_default_inputs, load_seed_inputs

__all__ = ["get_default_inputs", "load_seed_inputs"]
