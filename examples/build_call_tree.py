"""
Build a small two-context trace by hand and print it.

A request handler calls a repository method synchronously and hands off an
e-mail notification to a worker thread, recorded as a second sub-trace.
"""

import logging

from calltree import CallNode, HTTPRequestData, Location, SQLStatementData, Trace, render_call_tree

logging.basicConfig(level=logging.DEBUG)


def build_trace() -> Trace:
    trace = Trace(trace_id="checkout-42")
    request = trace.create_sub_trace("http", location=Location(host="web-1", application="shop"))
    worker = trace.create_sub_trace("mail", parent=request, location=Location(host="web-1", application="shop"))

    handler = CallNode(None, request)
    handler.set_signature("void", "com.shop.web", "CheckoutServlet", "doPost",
                          ["javax.servlet.http.HttpServletRequest", "javax.servlet.http.HttpServletResponse"])
    handler.entry_time = 1_700_000_000_000
    handler.response_time = 48_250_000
    handler.attach_additional_information(HTTPRequestData(url="/checkout", request_method="POST"))
    handler.attach_label("entry-point")

    query = CallNode(handler, request)
    query.set_signature("java.util.List", "com.shop.data", "OrderRepository", "findOpen", ["long"])
    query.response_time = 12_000_000
    query.attach_additional_information(SQLStatementData(sql_statement="SELECT * FROM orders WHERE customer = ?",
                                                         is_prepared=True, bound_values=["17"]))
    query.attach_label("db")

    hand_off = CallNode(handler, request)
    hand_off.set_signature("void", "java.util.concurrent", "ExecutorService", "submit", ["java.lang.Runnable"])
    hand_off.is_sub_trace_invocation = True
    hand_off.invoked_sub_trace = worker
    hand_off.is_async_invocation = True

    send = CallNode(None, worker)
    send.set_signature("void", "com.shop.mail", "Mailer", "send", ["java.lang.String"])
    send.response_time = 230_000_000
    return trace


if __name__ == "__main__":
    trace = build_trace()
    for sub_trace in trace.sub_traces:
        print(f"{sub_trace!r}")
        print(render_call_tree(sub_trace.root))
    slow = [node for node in trace if node.response_time > 100_000_000]
    print(f"{len(slow)} of {trace.size} calls took longer than 100ms")
