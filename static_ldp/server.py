import logging

from flask import Flask, Response, request, current_app

from .constants import ALLOWED_METHODS
from .graph import GraphError
from .negotiation import negotiate
from .resources import classify
from .responses import ResponseAssembler

logger = logging.getLogger(__name__)


def acceptable_content_types(accept):
    """Media types from a parsed Accept header, highest quality first,
    leaving out the ones the client refuses (q=0). Types of equal quality
    keep the order werkzeug gives them."""
    ranked = sorted(accept, key=lambda item: item[1], reverse=True)
    return [value for value, quality in ranked if quality > 0]


def flask_response(ldp_response):
    response = Response(ldp_response.body, status=ldp_response.status,
                        headers=ldp_response.headers.copy())
    # a HEAD response keeps the Content-Length of the representation it
    # stands for, not of its empty body
    if 'Content-Length' in ldp_response.headers:
        response.headers['Content-Length'] = \
            ldp_response.headers['Content-Length']
    return response


def create_app(config, loggers=None):
    app = Flask(__name__)
    app.config['LDP_CONFIG'] = config
    app.config['ASSEMBLER'] = ResponseAssembler(
        config.registry, config.default_format
        )
    access_log = loggers.file_only if loggers is not None else logger

    @app.route('/', defaults={'path': ''}, methods=['OPTIONS'])
    @app.route('/<path:path>', methods=['OPTIONS'])
    def options(path):
        return Response('', 200, {'Allow': ALLOWED_METHODS})

    @app.route('/', defaults={'path': ''}, methods=['GET', 'HEAD'],
               provide_automatic_options=False)
    @app.route('/<path:path>', methods=['GET', 'HEAD'],
               provide_automatic_options=False)
    def get_or_head(path):
        ldp_config = current_app.config['LDP_CONFIG']
        resource = classify(ldp_config.source_dir, path, ldp_config.registry)

        requested_format = None
        if 'Accept' in request.headers:
            requested_format = negotiate(
                acceptable_content_types(request.accept_mimetypes),
                ldp_config.registry
                )
        logger.debug("{0} /{1} => {2!r}, format {3}".format(
            request.method, path, resource, requested_format))

        ldp_response = current_app.config['ASSEMBLER'].assemble(
            resource,
            requested_format,
            request.method == 'GET',
            request.base_url
            )
        return flask_response(ldp_response)

    @app.after_request
    def log_request(response):
        access_log.info("{0} {1} {2}".format(
            request.method, request.full_path.rstrip('?'),
            response.status_code))
        return response

    def server_error(e):
        logger.error("Error serving {0}: {1}".format(request.path, e))
        return Response('Internal Server Error', 500,
                        content_type='text/plain')

    app.register_error_handler(GraphError, server_error)
    app.register_error_handler(OSError, server_error)

    return app
