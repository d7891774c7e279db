# Python modules
import json
import logging
from collections import OrderedDict
from typing import Dict, Optional

# Version of the function app payload
PAYLOAD_VERSION = "1.0"

# Name of the app logger (child records propagate to the Functions host)
TRACER_NAME = "servicebus"

# App settings resolved by the host for the trigger binding
SETTING_QUEUE_NAME = "ServiceBusQueueName"
SETTING_CONNECTION = "ServiceBusConnection"

# App settings read by the function itself
SETTING_TRACE_LEVEL      = "TraceLevel"
SETTING_TRACE_FORMAT     = "TraceFormat"
SETTING_TRACE_TO_CONSOLE = "TraceToConsole"

# Trace levels and formats
DEFAULT_TRACE_LEVEL         = logging.INFO
DEFAULT_CONSOLE_TRACE_LEVEL = logging.DEBUG
DEFAULT_TRACE_FORMAT        = "detailed"
TRACE_FORMATS               = ("detailed", "json", "simple")

# Simulated processing time per message
PROCESSING_DELAY_SECONDS = 30

# Log texts
MSG_START_PROCESSING = "Python ServiceBus Queue trigger start processing a message: %s"
MSG_END_PROCESSING   = "Python ServiceBus Queue trigger end processing a message"

# Formats a log/trace payload as JSON-formatted string
class JsonFormatter(logging.Formatter):
   def __init__(self,
                fieldMapping: Optional[Dict[str, str]] = None,
                datefmt: Optional[str] = None,
                customJson: Optional[json.JSONEncoder] = None):
      logging.Formatter.__init__(self, None, datefmt)
      self.fieldMapping = fieldMapping or {}
      self.customJson = customJson

   # Overridden from the parent class to look for the asctime attribute in the fields attribute
   def usesTime(self) -> bool:
      return "asctime" in self.fieldMapping.values()

   # Formats time using a specific date format
   def _formatTime(self,
                   record: logging.LogRecord) -> None:
      if self.usesTime():
         record.asctime = self.formatTime(record, self.datefmt)

   # Combines any supplied fields with the rendered message into an object to convert to JSON
   def _getJsonData(self,
                    record: logging.LogRecord):
      if len(self.fieldMapping.keys()) > 0:
         # Fields missing on the record (e.g. no invocation adapter) become null
         jsonContent = []
         for f in sorted(self.fieldMapping.keys()):
            jsonContent.append((f, getattr(record, self.fieldMapping[f], None)))
         jsonContent.append(("msg", record.getMessage()))

         # An OrderedDict is used to ensure that the converted data appears in the same order for every record
         return OrderedDict(jsonContent)
      else:
         return record.getMessage()

   # Overridden from the parent class to take a log record and output a JSON-formatted string
   def format(self,
              record: logging.LogRecord) -> str:
      self._formatTime(record)
      jsonData = self._getJsonData(record)
      return json.dumps(jsonData, cls=self.customJson, default=str)
