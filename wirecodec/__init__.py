# To re-export here.
from .commands import CommandName
from .errors import *
from .registry import CommandTemplate, CommandRegistry, RegistryBuilder
from .scripts import ScriptCommand, ELEMENT_KEY, element_reference
from .codec import Codec, HttpCommand, w3c_codec, json_wire_codec
from .config import Config, get_config, forget
from .builder import Builder
