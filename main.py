from rich.pretty import pprint

from argwright import *


class Serve:
    """
    Serve a directory over HTTP.

    Files are served read-only; directory listings are generated on the fly.
    """
    port: int
    bindAddress: str | None
    verbose: bool


if __name__ == '__main__':
    try:
        app = resolve_struct(
            Serve.__name__,
            docs=lines(Serve.__doc__),
            directives=[NameLiteral("version", "")],
            metadata=BuildMetadata.from_distribution("argwright"),
        )
        fields = [
            resolve_field(
                "port",
                Serve.__annotations__["port"],
                app.casing,
                docs=["Port to listen on."],
                directives=[Short(), Long(), NameLiteral("default_value", "8080"), Parse("try_from_str", int)],
            ),
            resolve_field(
                "bindAddress",
                Serve.__annotations__["bindAddress"],
                app.casing,
                directives=[Long()],
            ),
            resolve_field(
                "verbose",
                Serve.__annotations__["verbose"],
                app.casing,
                directives=[Short(), Long(), Parse("from_occurrences")],
            ),
        ]
    except ConfigError as error:
        trigger(error, shell=True, fancy=True)
    else:
        pprint(app)
        for field in fields:
            pprint(field)
            print(render(field))
