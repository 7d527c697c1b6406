"""Idea Forge CLI."""

import asyncio
import sys

import click
import httpx

from .config import get_settings
from .logging_config import setup_colored_logging


def _load_settings():
    try:
        return get_settings()
    except Exception as e:
        click.echo(f"Error loading settings: {e}", err=True)
        click.echo("Make sure .env file exists with OPENAI_API_KEY", err=True)
        sys.exit(1)


def _default_url() -> str:
    """Server URL from settings, without requiring an API key."""
    try:
        return get_settings().base_url
    except Exception:
        return "http://127.0.0.1:8430"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx, verbose):
    """Idea Forge - domain-aware innovation chat backend."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.option("--host", default=None, help="Interface to bind")
@click.option("--port", "-p", default=None, type=int, help="Port to run on")
@click.pass_context
def serve(ctx, host, port):
    """Start the chat API server."""
    from .server import create_app
    import uvicorn

    setup_colored_logging(ctx.obj.get("verbose", False))
    settings = _load_settings()
    app = create_app(settings)

    run_host = host or settings.host
    run_port = port or settings.port
    click.echo(f"Starting Idea Forge at http://{run_host}:{run_port}")

    uvicorn.run(app, host=run_host, port=run_port, log_level="info")


@cli.command()
@click.argument("question")
@click.pass_context
def classify(ctx, question):
    """Classify QUESTION into a domain category and print it."""
    from .engine import DomainClassifier
    from .llm import OpenAIClient

    setup_colored_logging(ctx.obj.get("verbose", False))
    settings = _load_settings()
    classifier = DomainClassifier(OpenAIClient(settings), settings.classifier_model)

    category = asyncio.run(classifier.classify(question))
    click.echo(category.value)


@cli.command()
@click.argument("question")
@click.option("--url", default=None, help="Server URL (defaults to configured host/port)")
def ask(question, url):
    """Send QUESTION to a running server and print the streamed answer."""
    from .server.datastream import FINISH_MESSAGE_PART, TEXT_PART, parse_part

    base_url = (url or _default_url()).rstrip("/")
    body = {"messages": [{"role": "user", "content": question}]}
    finished = False

    try:
        with httpx.stream("POST", f"{base_url}/api/chat", json=body, timeout=60.0) as response:
            if response.status_code != 200:
                response.read()
                click.echo(f"Error {response.status_code}: {response.text}", err=True)
                sys.exit(1)

            for line in response.iter_lines():
                if not line:
                    continue
                code, value = parse_part(line)
                if code == TEXT_PART:
                    click.echo(value, nl=False)
                elif code == FINISH_MESSAGE_PART:
                    finished = True
    except httpx.HTTPError as e:
        click.echo(f"Could not reach {base_url}: {e}", err=True)
        sys.exit(1)

    click.echo("")
    if not finished:
        click.echo("(answer was cut short)", err=True)


@cli.command()
@click.option("--url", default=None, help="Server URL (defaults to configured host/port)")
def status(url):
    """Check whether the server is up."""
    base_url = (url or _default_url()).rstrip("/")

    try:
        response = httpx.get(f"{base_url}/api/health", timeout=2.0)
    except httpx.HTTPError:
        click.echo(f"Idea Forge: not responding at {base_url}")
        sys.exit(1)

    if response.status_code == 200:
        version = response.json().get("version", "unknown")
        click.echo(f"Idea Forge: running at {base_url} (version {version})")
    else:
        click.echo(f"Idea Forge: unhealthy at {base_url} (HTTP {response.status_code})")
        sys.exit(1)


if __name__ == "__main__":
    cli()
