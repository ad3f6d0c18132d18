"""BPMNCode vocabulary tables shared by completion and hover."""

KEYWORDS: tuple[str, ...] = (
    "process",
    "start",
    "end",
    "task",
    "user",
    "service",
    "script",
    "xor",
    "and",
    "pool",
    "lane",
    "group",
    "note",
    "subprocess",
    "call",
    "event",
    "import",
    "from",
    "as",
)

# operator -> short description
FLOW_OPERATORS: dict[str, str] = {
    "->": "Sequence flow",
    "-->": "Message flow",
    "=>": "Default flow",
    "..>": "Association",
}

ATTRIBUTES: tuple[str, ...] = (
    "timeout",
    "assignee",
    "priority",
    "endpoint",
    "method",
    "version",
    "author",
    "description",
    "collapsed",
)

HOVER_DOCS: dict[str, str] = {
    "process": "Defines a BPMN process container",
    "subprocess": "Embedded processes.",
    "start": "Start event - begins the process flow",
    "end": "End event - terminates the process flow",
    "task": "Generic task activity",
    "user": "User task - requires human interaction",
    "service": "Service task - automated system call",
    "script": "Script task - executes code",
    "xor": "Exclusive gateway - single path selection",
    "and": "Parallel gateway - multiple parallel paths",
    "pool": "Process participant container",
    "lane": "Swimlane within a pool",
    "group": "Visual grouping of elements",
    "event": "Intermediate events",
    "call": "External process invocation",
    "note": "Process documentation",
    "->": "Sequence flow - normal process flow",
    "-->": "Message flow - communication between pools",
    "=>": "Default flow - fallback path from gateway",
    "..>": "Association - documentation link",
}

# Node keywords that declare a named element: ``task "Review"``
NODE_KEYWORDS: tuple[str, ...] = ("start", "end", "task", "user", "service", "script", "xor", "and")

# Container keywords that open a block: ``pool Sales {``
CONTAINER_KEYWORDS: tuple[str, ...] = ("process", "subprocess", "pool", "lane")
