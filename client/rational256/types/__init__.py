from .rational import *
