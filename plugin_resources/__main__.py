from plugin_resources.cli.main import app


app()
