"""liveprops: smart properties, computed properties and two-way bindings."""

from importlib.metadata import version as _version

__version__ = _version("liveprops")

from liveprops.events import Events
from liveprops.prop import ComputedProperty, prop, computed, is_computed
from liveprops.smart import SmartProperties, LiveObject, change_event, CHANGE_SUFFIX
from liveprops.binding import Binding, bind_properties
from liveprops._watchers import DependencyCycleError
# textual NOT auto-imported, opt-in only

__all__ = [
    "Events",
    "ComputedProperty",
    "prop",
    "computed",
    "is_computed",
    "SmartProperties",
    "LiveObject",
    "change_event",
    "CHANGE_SUFFIX",
    "Binding",
    "bind_properties",
    "DependencyCycleError",
]
