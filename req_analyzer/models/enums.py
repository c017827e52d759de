from enum import Enum

class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"  # part of the output domain, no rule selects it yet

class Complexity(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

class Signal(str, Enum):
    SECURITY = "security"
    DATA = "data"
    WEB = "web"
    HIGH_TRAFFIC = "high_traffic"
    FINANCIAL = "financial"

class AnalysisStatus(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    COMPLETED = "completed"
    ERROR = "error"

class SessionEvent(str, Enum):
    SUBMIT = "submit"
    SUCCESS = "success"
    FAILURE = "failure"
    RESET = "reset"
