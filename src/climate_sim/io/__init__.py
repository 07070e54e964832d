from .loader import load_scenarios, load_default_scenarios, parse_scenarios

__all__ = ["load_scenarios", "load_default_scenarios", "parse_scenarios"]
