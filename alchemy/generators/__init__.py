"""
Generator registry.

Each generator is a dict describing how to build a generate function:
    make_generate:  (config) -> generate(name_a, name_b) -> {"name", "emoji"}
    needs_api_key:  bool
    description:    str
"""

from .recipes import recipe_generate, RECIPES
from .interactive import interactive_generate
from .llm import make_llm_generate


GENERATORS = {
    "llm": {
        "make_generate": make_llm_generate,
        "needs_api_key": True,
        "description":   "Claude invents the result of every new pair",
    },
    "recipes": {
        "make_generate": lambda config: recipe_generate,
        "needs_api_key": False,
        "description":   "Offline recipe table over the four base elements",
    },
    "interactive": {
        "make_generate": lambda config: interactive_generate,
        "needs_api_key": False,
        "description":   "Human in the loop: you decide what each pair makes",
    },
}
