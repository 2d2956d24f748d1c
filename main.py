import argparse

from icecream import ic

from core.abstract import App
from core.config import get_settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Service Pulseboard - API server and dashboard")

    parser.add_argument(
        "--mode",
        "-m",
        choices=["client", "server"],
        default="server",
        help="Run the API 'server' or the dashboard 'client' (default: server)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print icecream debug traces",
    )
    args = parser.parse_args()

    ic.configureOutput(prefix="DEBUG | ", includeContext=True)
    if not args.debug:
        ic.disable()

    settings = get_settings()
    ic(args.mode, settings.api_base_url, settings.server_port, settings.database_backend)

    app_cls: type[App] | None = None
    if args.mode == "client":
        from client.app import ClientApp

        app_cls = ClientApp
    elif args.mode == "server":
        from server.app import ServerApp

        app_cls = ServerApp

    if app_cls is not None:
        app = app_cls(settings)
        app.run()


if __name__ == "__main__":
    main()
