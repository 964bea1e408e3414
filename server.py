
# 
# Copyright (c) 2020, 2021, John Grundback
# All rights reserved.
# 

import os
import logging

from functools import partial

from flask import Flask
from flask_cors import CORS
from flask import Response, request
from flask.views import View

from graphql import print_schema
from graphql_server import (
    HttpQueryError,
    format_error_default,
    encode_execution_results,
    json_encode,
    load_json_body,
    run_http_query
)
from graphql_server.render_graphiql import (
    GraphiQLConfig,
    GraphiQLData,
    render_graphiql_sync
)

from gevent import pywsgi

from tweet_store import Store
from tweet_schema import tweet_schema

logger = logging.getLogger(__name__)

# 
# 
# 

listen_addr = os.environ.get("LISTEN_ADDR", "0.0.0.0")
listen_port = os.environ.get("LISTEN_PORT", "5000")
debug = os.environ.get("DEBUG", "false").lower() in ("1", "true", "yes")
log_level = os.environ.get("LOG_LEVEL", "INFO")

# 
# 
# 


class GQLView(View):

    schema = None
    store = None
    graphiql_html_title = 'tweetql'

    methods = ['GET', 'POST', 'PUT', 'DELETE']

    def __init__(self, **kwargs):
        super(GQLView, self).__init__()
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def context(self):
        return {
            "request": request,
            "store": self.store
        }

    def graphiql(self, params, result):
        data = GraphiQLData(
            query=params.query if params else None,
            variables=params.variables if params else None,
            operation_name=params.operation_name if params else None,
            result=result,
            headers=None,
            subscription_url=None
        )
        config = GraphiQLConfig(
            graphiql_version=None,
            graphiql_template=None,
            graphiql_html_title=self.graphiql_html_title,
            jinja_env=None
        )
        return Response(
            render_graphiql_sync(data=data, config=config),
            content_type='text/html'
        )

    format_error = staticmethod(format_error_default)
    encode = staticmethod(json_encode)

    def dispatch_request(self):

        show_graphiql = request.method.lower() == 'get' and self.is_graphiql()

        try:

            data = self.parse_body()

            execution_results, all_params = run_http_query(
                self.schema,
                request.method.lower(),
                data,
                query_data=request.args,
                catch=show_graphiql,
                context_value=self.context()
            )

            result, status_code = encode_execution_results(
                execution_results,
                is_batch=isinstance(data, list),
                format_error=self.format_error,
                encode=partial(self.encode, pretty=True)
            )

            if show_graphiql:
                return self.graphiql(
                    params=all_params[0],
                    result=result
                )

            return Response(
                result,
                status=status_code,
                content_type='application/json'
            )

        except HttpQueryError as e:
            if show_graphiql:
                return self.graphiql(params=None, result=None)
            logger.warning("rejected %s request: %s", request.method, e.message)
            return Response(
                self.encode({
                    'errors': [{'message': e.message}]
                }),
                status=e.status_code,
                headers=e.headers,
                content_type='application/json'
            )

    def parse_body(self):
        if request.mimetype == 'application/graphql':
            return {
                'query': request.data.decode('utf8')
            }

        elif request.mimetype == 'application/json':
            return load_json_body(
                request.data.decode('utf8')
            )

        return {}

    def is_graphiql(self):
        return self.is_html()

    def is_html(self):
        best = request.accept_mimetypes \
            .best_match(['application/json', 'text/html'])
        return best == 'text/html' and \
            request.accept_mimetypes[best] > \
            request.accept_mimetypes['application/json']


class GraphQLSchemaView(View):

    def __init__(self, schema):
        super(GraphQLSchemaView, self).__init__()
        self.schema = schema

    def dispatch_request(self):
        return Response(
            print_schema(self.schema),
            content_type='text/plain'
        )


def create_app(store=None, schema=tweet_schema):

    app = Flask(__name__)
    CORS(app)

    app.config["DEBUG"] = debug
    app.config['CORS_HEADERS'] = 'Content-Type'

    if store is None:
        store = Store()

    view_func = GQLView.as_view(
        'graphql',
        schema=schema,
        store=store
    )
    app.add_url_rule(
        '/graphql',
        view_func=view_func
    )

    view_func2 = GraphQLSchemaView.as_view(
        'graphql_schema',
        schema
    )
    app.add_url_rule(
        '/graphql/schema',
        view_func=view_func2
    )

    return app


app = create_app()


def main():
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    server = pywsgi.WSGIServer((str(listen_addr), int(listen_port)), app)
    logger.info("Running on http://%s:%d/graphql", listen_addr, int(listen_port))
    server.serve_forever()


if __name__ == "__main__":
    main()
