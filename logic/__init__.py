"""logic — Game systems package.

Subpackages
-----------
ai/         — patrol routes, vision cone detection

Top-level modules
-----------------
game            — Game aggregate: score, detection state, pause, reset
tick            — per-frame system pipeline
entity_factory  — player / guard construction from tuning values
movement        — player integration + viewport clamping
input_manager   — keyboard / touch → player velocity
"""
