#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import click
import logging
import sys

from static_ldp.version import __version__
from static_ldp.model import Config, ConfigError
from static_ldp.loggers import createLoggers
from static_ldp.server import create_app


@click.command()
@click.option('--host', '-h',
              help='Interface to listen on (overrides the config file).',
              default=None)
@click.option('--port', '-p',
              help='Port to listen on (overrides the config file).',
              type=int, default=None)
@click.option('--logfile', '-l',
              help='Path to log file (to store a log of served requests).',
              default='static-ldp.log')
@click.option('--loglevel', '-g',
              help='Level of information to output (INFO, WARN, DEBUG, ERROR)',
              default='INFO')
@click.version_option(__version__)
@click.argument('configfile', type=click.Path(exists=True), required=True)
def main(configfile, host, port, logfile, loglevel):
    """Serve a directory tree as a read-only Linked Data Platform server.

    Using a CONFIGFILE (a YAML file naming the sourceDirectory to serve
    and the RDF formats to accept), every file and directory below the
    source directory becomes an LDP resource: RDF files as RDFSources in
    the format the client asks for, other files as NonRDFSources and
    directories as BasicContainers.
    """

    level = getattr(logging, loglevel.upper(), None)
    if not isinstance(level, int):
        raise click.BadParameter('Unknown log level: {0}'.format(loglevel),
                                 param_hint='--loglevel')
    loggers = createLoggers(level, logfile)

    loggers.console.info("version: {0}".format(__version__))

    try:
        config = Config.from_file(configfile, loggers)
    except ConfigError as e:
        loggers.console.error(str(e))
        sys.exit(1)

    if host is None:
        host = config.host
    if port is None:
        port = config.port

    app = create_app(config, loggers)
    loggers.console_only.info(
        "Serving {0} at http://{1}:{2}/".format(config.source_dir, host, port)
        )
    app.run(host=host, port=port, threaded=True)


if __name__ == "__main__":
    main()
