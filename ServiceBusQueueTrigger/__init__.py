import asyncio

import azure.functions as func

from shared_code import const
from shared_code.context import Context
from shared_code.tracing import tracing

tracer = tracing.initTracer()


async def main(msg: func.ServiceBusMessage, context: func.Context) -> None:
    ctx = Context(msg, context)
    log = tracing.getInvocationTracer(tracer, ctx)

    log.info(const.MSG_START_PROCESSING, ctx.body)
    for name, value in ctx.metadata().items():
        log.debug('%s: %s', name, value)

    # Stands in for the processing time of the real workload
    await asyncio.sleep(const.PROCESSING_DELAY_SECONDS)

    log.info(const.MSG_END_PROCESSING)
