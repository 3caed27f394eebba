"""
main.py — Bootstrap

1. Load tuning constants
2. Create the app (window sized from tuning)
3. Push the stealth scene
4. Run
"""

from core import tuning
from core.app import App
from core.constants import WINDOW_WIDTH, WINDOW_HEIGHT, FPS
from scenes.stealth_scene import StealthScene


def main():
    tuning.load()

    app = App(title="Stealth",
              width=int(tuning.get("display", "width", WINDOW_WIDTH)),
              height=int(tuning.get("display", "height", WINDOW_HEIGHT)),
              fps=int(tuning.get("display", "fps", FPS)))

    app.push_scene(StealthScene())
    app.run()


if __name__ == "__main__":
    main()
