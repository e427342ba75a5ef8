"""orgswitch CLI - run and inspect the organization switch grant server."""

import click

from scitrera_app_framework import get_variables


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logs")
def cli(verbose: bool):
    """orgswitch - OAuth2 organization switch grant server."""
    v = get_variables()  # get variables instance prior to preconfigure() call
    if verbose:
        v.set("LOGGING_LEVEL", "DEBUG")


@cli.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
def serve(host: str, port: int):
    """Start the HTTP token endpoint."""
    import uvicorn
    from orgswitch_server.config import (
        ORGSWITCH_SERVER_HOST, ORGSWITCH_SERVER_PORT, DEFAULT_ORGSWITCH_SERVER_HOST, DEFAULT_ORGSWITCH_SERVER_PORT
    )
    from orgswitch_server.dependencies import preconfigure
    from orgswitch_server.lifecycle.fastapi import fastapi_app_factory

    # preconfigure ensures that plugins are registered
    v, _ = preconfigure()
    if host is None:
        host = v.environ(ORGSWITCH_SERVER_HOST, default=DEFAULT_ORGSWITCH_SERVER_HOST)
    if port is None:
        port = v.environ(ORGSWITCH_SERVER_PORT, default=DEFAULT_ORGSWITCH_SERVER_PORT, type_fn=int)

    app = fastapi_app_factory(v)

    click.echo(f"Starting orgswitch server on {host}:{port}")
    uvicorn.run(
        app,
        host=host,
        port=port,
        reload=False,
    )


@cli.command(name='grant-types')
def grant_types():
    """List the grant types served with the current configuration."""
    from orgswitch_server.dependencies import initialize_services_sync
    from orgswitch_server.services.grant import get_grant_handler_registry

    v = initialize_services_sync()
    for grant_type in get_grant_handler_registry(v).grant_types:
        click.echo(grant_type)


@cli.command(name='check-switch')
@click.argument('source_organization')
@click.argument('target_organization')
def check_switch(source_organization: str, target_organization: str):
    """Report whether a token for SOURCE_ORGANIZATION may switch to TARGET_ORGANIZATION."""
    from orgswitch_server.dependencies import initialize_services_sync
    from orgswitch_server.exceptions import OAuth2ClientError, OAuth2ServerError
    from orgswitch_server.services.grant import check_organization_is_allowed_to_switch
    from orgswitch_server.services.organization import get_organization_resolver

    v = initialize_services_sync()
    try:
        depth = check_organization_is_allowed_to_switch(
            get_organization_resolver(v), source_organization, target_organization
        )
    except OAuth2ClientError as e:
        click.echo(f"rejected: {e.message}")
        raise SystemExit(1)
    except OAuth2ServerError as e:
        click.echo(f"Error: {e.message} ({e.__cause__})", err=True)
        raise SystemExit(2)

    click.echo(f"allowed: relative depth {depth}")


@cli.command()
def version():
    """Show version information."""
    from orgswitch_server import __version__
    click.echo(f"orgswitch v{__version__}")


if __name__ == '__main__':
    cli()
