from .channel import Channel
from .events import SyncEvent, SyncEventModel, SyncEventType
from .relay import NotificationRelay, RelayState
from .sink import CallbackSink, ChannelSink, EventSink
from .translator import translate_event
