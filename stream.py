from enum import Enum

from utils import IllegalStateError, get_logger, require_callable, require_count

logger = get_logger("stream")

_MISSING = object()

CONSUMED_MESSAGE = "stream has already been operated upon or closed"


class SourceKind(str, Enum):
    """Where the elements of a stream come from"""
    VALUES = "values"
    COLLECTION = "collection"
    ARRAY = "array"
    EMPTY = "empty"
    BUILDER = "builder"
    ITERATE = "iterate"
    GENERATE = "generate"
    PATTERN = "pattern"
    ITERATOR = "iterator"
    ITERABLE = "iterable"


class StreamState(str, Enum):
    UNCONSUMED = "unconsumed"
    CONSUMED = "consumed"


class LazyStream:
    """
    A single-pass, lazy stream. Intermediate operations are recorded and applied
    only when a terminal operation pulls elements through the pipeline.

    Every stream can be operated upon exactly once: chaining an intermediate
    operation hands the pipeline over to the returned stream, and a terminal
    operation consumes it. Any further use raises IllegalStateError.
    """
    def __init__(self, source, kind=SourceKind.COLLECTION, bounded=True, ops=None):
        self._source = source
        self._kind = SourceKind(kind)
        self._bounded = bounded
        self._ops = ops or []          # sequence of ("op_name", callable/arg)
        self._state = StreamState.UNCONSUMED

    @property
    def kind(self):
        return self._kind

    @property
    def bounded(self):
        return self._bounded

    @property
    def state(self):
        return self._state

    @property
    def consumed(self):
        return self._state is StreamState.CONSUMED

    def __repr__(self):
        ops = ", ".join(op for op, _ in self._ops)
        return (
            f"LazyStream(kind={self._kind.value}, bounded={self._bounded}, "
            f"state={self._state.value}, ops=[{ops}])"
        )

    # --------- chainable operators (lazy) ----------
    def map(self, fn):
        return self._with_op(("map", require_callable(fn, "fn")))

    def filter(self, pred):
        return self._with_op(("filter", require_callable(pred, "pred")))

    def skip(self, n):
        return self._with_op(("skip", require_count(n, "n")))

    def limit(self, n):
        """Truncate to at most n elements; this bounds an infinite stream"""
        return self._with_op(("limit", require_count(n, "n")), bounded=True)

    # --------- terminal operations (force evaluation) ----------
    def for_each(self, action):
        """Apply action to every element, in order"""
        require_callable(action, "action")
        for item in self._drain("for_each"):
            action(item)

    def to_list(self):
        return list(self._drain("to_list"))

    def count(self):
        """Return the count of elements"""
        count = 0
        for _ in self._drain("count"):
            count += 1
        return count

    def reduce(self, fn, initial=_MISSING):
        """Fold elements left to right; without initial an empty stream returns None"""
        require_callable(fn, "fn")
        items = self._drain("reduce")
        if initial is _MISSING:
            result = next(items, _MISSING)
            if result is _MISSING:
                return None
        else:
            result = initial
        for item in items:
            result = fn(result, item)
        return result

    def first(self, default=None):
        """Return the first element, or default if empty"""
        for item in self._open("first"):
            return item
        return default

    def any_match(self, pred):
        require_callable(pred, "pred")
        return any(pred(x) for x in self._open("any_match"))

    def all_match(self, pred):
        require_callable(pred, "pred")
        return all(pred(x) for x in self._open("all_match"))

    def none_match(self, pred):
        require_callable(pred, "pred")
        return not any(pred(x) for x in self._open("none_match"))

    # --------- iterator protocol ----------
    def __iter__(self):
        # Iterating is a terminal operation; state checks run here, not on first next()
        return self._open("iter")

    # --------- helpers ----------
    def _check_usable(self, operation):
        if self._state is StreamState.CONSUMED:
            logger.warning(f"{operation}() called on a consumed {self._kind.value} stream")
            raise IllegalStateError(CONSUMED_MESSAGE)

    def _with_op(self, op_tuple, bounded=None):
        self._check_usable(op_tuple[0])
        self._state = StreamState.CONSUMED
        return LazyStream(
            self._source,
            self._kind,
            self._bounded if bounded is None else bounded,
            self._ops + [op_tuple],
        )

    def _open(self, operation):
        self._check_usable(operation)
        self._state = StreamState.CONSUMED
        logger.debug(f"{operation}() consuming {self!r}")
        return self._pipeline()

    def _drain(self, operation):
        # Refused up front, without producing anything, so the stream stays usable
        if not self._bounded:
            logger.warning(f"{operation}() refused on unbounded {self._kind.value} stream")
            raise IllegalStateError(
                f"{operation}() would never finish on an unbounded "
                f"{self._kind.value} stream; apply limit() first"
            )
        return self._open(operation)

    def _pipeline(self):
        it = iter(self._source)
        for op, arg in self._ops:
            if op == "map":
                fn = arg
                it = (fn(x) for x in it)
            elif op == "filter":
                pred = arg
                it = (x for x in it if pred(x))
            elif op == "skip":
                k = arg
                def _skip(gen, k=k):
                    skipped = 0
                    for x in gen:
                        if skipped < k:
                            skipped += 1
                            continue
                        yield x
                it = _skip(it)
            elif op == "limit":
                n = arg
                # Stop right after the n-th element so upstream functions are
                # never asked for element n+1.
                def _limit(gen, n=n):
                    if n <= 0:
                        return
                    taken = 0
                    for x in gen:
                        yield x
                        taken += 1
                        if taken >= n:
                            return
                it = _limit(it)
        yield from it


class StreamBuilder:
    """
    Accumulates elements one at a time, then seals them into a LazyStream.
    Once build() has been called the builder accepts nothing further.
    """
    def __init__(self):
        self._elements = []
        self._built = False

    @property
    def built(self):
        return self._built

    def accept(self, element):
        if self._built:
            logger.warning("accept() called on a builder that was already built")
            raise IllegalStateError("builder has already been built")
        self._elements.append(element)

    def add(self, element):
        """Append an element and return the builder for chaining"""
        self.accept(element)
        return self

    def build(self):
        if self._built:
            logger.warning("build() called twice on the same builder")
            raise IllegalStateError("builder has already been built")
        self._built = True
        logger.debug(f"Built stream from {len(self._elements)} element(s)")
        return LazyStream(self._elements, SourceKind.BUILDER)
