"""
Interactive GraphQL editor served at the site root.
"""

from string import Template

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter()

GRAPHIQL_VERSION = "3.0.10"

PLAYGROUND_TEMPLATE = Template(
    """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>GraphQL Playground</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      html, body, #graphiql { height: 100%; margin: 0; overflow: hidden; width: 100%; }
    </style>
    <link rel="stylesheet" href="https://unpkg.com/graphiql@${version}/graphiql.min.css" />
  </head>
  <body>
    <div id="graphiql">Loading...</div>
    <script crossorigin src="https://unpkg.com/react@18/umd/react.production.min.js"></script>
    <script crossorigin src="https://unpkg.com/react-dom@18/umd/react-dom.production.min.js"></script>
    <script crossorigin src="https://unpkg.com/graphiql@${version}/graphiql.min.js"></script>
    <script>
      var GRAPHQL_URL = "${endpoint}";
      var fetcher = GraphiQL.createFetcher({ url: GRAPHQL_URL });
      var root = ReactDOM.createRoot(document.getElementById("graphiql"));
      root.render(React.createElement(GraphiQL, { fetcher: fetcher }));
    </script>
  </body>
</html>
"""
)


def render_playground(endpoint: str) -> str:
    """Render the GraphiQL page, pointing its fetcher at ``endpoint``."""
    return PLAYGROUND_TEMPLATE.substitute(endpoint=endpoint, version=GRAPHIQL_VERSION)


@router.get("/", response_class=HTMLResponse)
async def playground(request: Request) -> HTMLResponse:
    """Serve the GraphQL playground page."""
    return HTMLResponse(render_playground(request.app.state.graphql_path))
