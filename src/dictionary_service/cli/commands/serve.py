"""
Serve command: run the HTTP API.
"""

from dictionary_service.config import Settings
from dictionary_service.server import run


def add_subparser(subparsers):
    parser = subparsers.add_parser("serve", help="Run the HTTP API")
    parser.add_argument("--dict", dest="dict_path", help="Dictionary snapshot or .json source")
    parser.add_argument("--host", help="Bind address")
    parser.add_argument("--port", type=int, help="Bind port")
    parser.add_argument("--static", dest="static_dir", help="Frontend directory ('' disables)")
    parser.set_defaults(func=serve)


def serve(args):
    settings = Settings()
    server = settings.server.model_copy(
        update={
            k: v
            for k, v in {"host": args.host, "port": args.port, "static_dir": args.static_dir}.items()
            if v is not None
        }
    )
    dictionary = settings.dictionary
    if args.dict_path:
        dictionary = dictionary.model_copy(update={"path": args.dict_path})
    run(settings.model_copy(update={"server": server, "dictionary": dictionary}))
