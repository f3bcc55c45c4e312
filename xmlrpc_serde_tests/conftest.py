import logging

import structlog

# debug events are emitted on every conversion failure, they would end up in the captured output of the doctests
structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.INFO))
