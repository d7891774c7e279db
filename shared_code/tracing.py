# Python modules
import copy
import logging
import logging.config
import os

# Function app modules
from . import const

# Helper class to set up tracing for the function app
class tracing:
   config = {
       "version": 1,
       # The Functions worker owns the root logger; leave its loggers alone
       "disable_existing_loggers": False,
       "formatters": {
           "json": {
               "()": const.JsonFormatter,
               "fieldMapping": {
                   "pid": "process",
                   "timestamp": "asctime",
                   "traceLevel": "levelname",
                   "module": "filename",
                   "lineNum": "lineno",
                   "function": "funcName",
                   "payloadVersion": "payloadversion",
                   "invocationId": "invocationid",
                   "functionName": "functionname"
               }
           },
           "detailed": {
               "format": "[%(process)d] %(asctime)s %(levelname).1s %(filename)s:%(lineno)d %(message)s"
           },
           "simple": {
               "format": "%(levelname)-8s %(message)s"
           }
       },
       "handlers": {
           "console": {
               "class": "logging.StreamHandler",
               "formatter": const.DEFAULT_TRACE_FORMAT,
               "level": const.DEFAULT_CONSOLE_TRACE_LEVEL
           },
       },
       "loggers": {
           const.TRACER_NAME: {
               "level": const.DEFAULT_TRACE_LEVEL,
               "handlers": [],
               "propagate": True
           }
       }
   }

   # Resolve the trace level from app settings, falling back to the default
   @staticmethod
   def getTraceLevel() -> int:
      levelName = os.environ.get(const.SETTING_TRACE_LEVEL, "").strip().upper()
      if not levelName:
         return const.DEFAULT_TRACE_LEVEL
      level = logging.getLevelName(levelName)
      if not isinstance(level, int):
         logging.getLogger(const.TRACER_NAME).warning(
            "unknown trace level %s, using %s" % (levelName,
                                                  logging.getLevelName(const.DEFAULT_TRACE_LEVEL)))
         return const.DEFAULT_TRACE_LEVEL
      return level

   # Resolve the trace format from app settings, falling back to the default
   @staticmethod
   def getTraceFormat() -> str:
      traceFormat = os.environ.get(const.SETTING_TRACE_FORMAT, "").strip().lower()
      if not traceFormat:
         return const.DEFAULT_TRACE_FORMAT
      if traceFormat not in const.TRACE_FORMATS:
         logging.getLogger(const.TRACER_NAME).warning(
            "unknown trace format %s, using %s" % (traceFormat, const.DEFAULT_TRACE_FORMAT))
         return const.DEFAULT_TRACE_FORMAT
      return traceFormat

   @staticmethod
   def traceToConsole() -> bool:
      return os.environ.get(const.SETTING_TRACE_TO_CONSOLE, "").strip().lower() in ("1", "true", "yes")

   # Build the dictConfig for the current app settings
   @staticmethod
   def buildConfig() -> dict:
      config = copy.deepcopy(tracing.config)
      config["handlers"]["console"]["formatter"] = tracing.getTraceFormat()
      loggerConfig = config["loggers"][const.TRACER_NAME]
      loggerConfig["level"] = tracing.getTraceLevel()
      if tracing.traceToConsole():
         loggerConfig["handlers"] = ["console"]
      return config

   # Initialize the tracer object
   @staticmethod
   def initTracer() -> logging.Logger:
      logging.config.dictConfig(tracing.buildConfig())
      return logging.getLogger(const.TRACER_NAME)

   # Wrap the tracer so every record carries the invocation it belongs to
   @staticmethod
   def getInvocationTracer(tracer: logging.Logger,
                           ctx) -> logging.LoggerAdapter:
      return logging.LoggerAdapter(tracer, {
         "invocationid": ctx.invocationId,
         "functionname": ctx.functionName,
         "payloadversion": const.PAYLOAD_VERSION,
      })
