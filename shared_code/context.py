# Python modules
from collections import OrderedDict
from typing import Any, Optional

# Snapshot of a single trigger invocation (the message and what the host told us about it)
class Context:
   def __init__(self,
                msg: Any,
                hostContext: Optional[Any] = None):
      self.invocationId = getattr(hostContext, "invocation_id", None)
      self.functionName = getattr(hostContext, "function_name", None)
      self.messageId = getattr(msg, "message_id", None)
      self.enqueuedTimeUtc = getattr(msg, "enqueued_time_utc", None)
      self.deliveryCount = getattr(msg, "delivery_count", None)
      self.body = Context.getBodyText(msg)

   # The body is handed to the logger as text; it is never parsed. Bytes that are
   # not UTF-8 are rendered as backslash escapes
   @staticmethod
   def getBodyText(msg: Any) -> Any:
      getBody = getattr(msg, "get_body", None)
      if getBody is None:
         return msg
      body = getBody()
      if isinstance(body, (bytes, bytearray)):
         return body.decode("utf-8", errors="backslashreplace")
      return body

   # Message metadata supplied by the host, in a stable order
   def metadata(self) -> OrderedDict:
      fields = OrderedDict([
         ("MessageId", self.messageId),
         ("EnqueuedTimeUtc", self.enqueuedTimeUtc),
         ("DeliveryCount", self.deliveryCount),
      ])
      return OrderedDict((k, v) for k, v in fields.items() if v is not None)
