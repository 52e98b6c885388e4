"""
Search server parameters.

These are fixed for the lifetime of the process; nothing reads them from the
environment.
"""


class Parameters:
    """
    Engine constants.

        max_result_document_count: how many documents find_top_documents returns
        relevance_epsilon: relevances closer than this are ordered by rating
        requests_window: how many past requests a RequestQueue retains (one per minute of a day)
    """

    max_result_document_count: int = 5
    relevance_epsilon: float = 1e-6
    requests_window: int = 1440
