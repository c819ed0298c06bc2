"""Allow ``python -m dating_app`` to run the demo scenario."""

from dating_app.app.main import main

if __name__ == "__main__":
    main()
