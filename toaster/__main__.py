from __future__ import annotations

import argparse


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="toaster",
        description="toaster - self-dismissing toast notifications for Textual",
    )
    parser.add_argument("--config", help="Path to config file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    from toaster.app import ToasterApp

    app = ToasterApp(config_path=args.config, verbose=args.verbose)
    app.run()


if __name__ == "__main__":
    main()
