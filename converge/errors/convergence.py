"""
Convergence errors raised while observing a remote resource.

Outcome values (timed out, failed) are carried on ConvergenceResult and
only become exceptions when a caller asks for them via
ConvergenceResult.raise_for_outcome().
"""


class ConvergeError(Exception):
    """Base class for every error raised by the convergence engine."""

    pass


class DecodeError(ConvergeError):
    """
    Raised when a status document cannot be mapped onto the expected shape.

    Decoding is all-or-nothing: a document with a missing required field,
    a wrong value type, or an unknown condition status is rejected as a
    whole. Never retried, regardless of the fetch error policy.
    """

    def __init__(self, message: str, document_type: str | None = None) -> None:
        self.document_type = document_type
        if document_type:
            message = f"failed to decode {document_type}: {message}"

        super().__init__(message)


class TypeMismatchError(ConvergeError):
    """
    Raised when a watch event carries an object that is not the expected
    resource type. A malformed event means the upstream stream broke its
    contract, so the watch is abandoned rather than treated as pending.
    """

    def __init__(self, expected: type, received: object) -> None:
        self.expected = expected
        self.received_type = type(received)
        super().__init__(
            f"unexpected type {self.received_type.__name__}, expected {expected.__name__}"
        )


class FetchError(ConvergeError):
    """
    Raised when a status fetch fails under the fatal fetch error policy.
    The transient cause is chained as __cause__.
    """

    def __init__(self, resource: str, cause: BaseException) -> None:
        self.resource = resource
        self.cause = cause
        super().__init__(f"failed to fetch {resource}: {cause}")


class OperationFailed(ConvergeError):
    """The remote operation reached a terminal failure condition."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class ConvergenceTimeout(ConvergeError):
    """The deadline passed before the operation reached a terminal outcome."""

    def __init__(
        self,
        message: str,
        elapsed: float,
        last_error: BaseException | None = None,
    ) -> None:
        self.elapsed = elapsed
        self.last_error = last_error
        super().__init__(message)
