"""scenes — Screens pushed onto the App's scene stack."""
