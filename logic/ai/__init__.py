"""logic/ai — AI subpackage.

Modules
-------
patrol      — cyclic waypoint following
perception  — vision cone test + per-guard detection flag
"""

from logic.ai.patrol import patrol_step, patrol_system
from logic.ai.perception import in_vision_cone, check_detection

__all__ = ["patrol_step", "patrol_system", "in_vision_cone", "check_detection"]
