# -*- coding: utf-8 -*-

from .shared_settings_and_exceptions import *
from .tokens import *
from .matcher import *
from .text_stream import *
from .lexer import *
from .helpers import *
