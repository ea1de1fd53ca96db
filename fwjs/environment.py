import logging

from fwjs.errors import DuplicateDeclaration
from fwjs.values import NullVal

logger = logging.getLogger(__name__)


class Environment:
    """A single scope in the chain of lexical scopes.

    The global scope has no outer environment. Each function call gets a
    new scope whose outer environment is the one its closure captured.
    """

    def __init__(self, outerEnv=None):
        self.env = {}
        self.outerEnv = outerEnv

    def newScope(self):
        return Environment(self)

    def getOuterEnv(self):
        return self.outerEnv

    def globalEnv(self):
        currentEnv = self
        while currentEnv.outerEnv is not None:
            currentEnv = currentEnv.outerEnv
        return currentEnv

    def getVar(self, name):
        return self.env.get(name)

    def setVar(self, name, value):
        self.env[name] = value

    def resolveVar(self, name):
        # Unknown names are null, like undefined in JS.
        currentEnv = self
        while currentEnv is not None:
            if name in currentEnv.env: return currentEnv.env[name]
            currentEnv = currentEnv.outerEnv
        return NullVal()

    def declareVar(self, name, value):
        if name in self.env: raise DuplicateDeclaration(name)
        self.setVar(name, value)

    def updateVar(self, name, value):
        currentEnv = self
        while name not in currentEnv.env and currentEnv.outerEnv is not None:
            currentEnv = currentEnv.outerEnv
        if name not in currentEnv.env:
            logger.debug("implicitly creating global %s", name)
        currentEnv.setVar(name, value)

    def __contains__(self, name):
        return name in self.env

    def __repr__(self):
        return "Environment(%s)" % ", ".join(sorted(self.env))
