import logging


class Loggers:
    def __init__(self, console, console_only, file_only):
        self.console = console
        self.console_only = console_only
        self.file_only = file_only


def createLoggers(level, logfilename=None):
    '''Creates and configures a Loggers object which contains three loggers:
        console - the static_ldp package logger; logs to both the console
                  and the log file, and receives the module loggers
        console_only - logs only to the console
        file_only - the request log; only logs to the file (discards if
                    there is no file)'''

    # create console logger
    console = logging.getLogger("static_ldp")
    console.setLevel(level)

    console_handler = logging.StreamHandler()
    if logfilename is not None:
        file_handler = logging.FileHandler(filename=logfilename, mode="a")
    else:
        file_handler = logging.NullHandler()

    # create formatters
    console_formatter = logging.Formatter("%(asctime)s %(levelname)-8s "
                                          "%(message)s")
    file_formatter = logging.Formatter("%(asctime)s %(levelname)-8s "
                                       "%(module)-12s : %(lineno)d =>  "
                                       "%(message)s")

    console_handler.setFormatter(console_formatter)
    file_handler.setFormatter(file_formatter)
    console.addHandler(console_handler)
    console.addHandler(file_handler)

    # create console only logger
    console_only = logging.getLogger("static_ldp_console")
    console_only.setLevel(logging.DEBUG)
    console_only.propagate = False
    console_only.addHandler(console_handler)

    # create file only logger
    file_only = logging.getLogger("static_ldp_file")
    file_only.setLevel(level)
    file_only.propagate = False
    file_only.addHandler(file_handler)

    loggers = Loggers(console, console_only, file_only)

    return loggers
