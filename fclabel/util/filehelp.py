"""Filesystem helper functions."""

# This file is part of fclabel.
# See `License` for details of license and warranty.

import logging
import os
import shutil
import tempfile

class TempDir(object):
    """A temporary directory which must be removed explicitly."""
    def __init__(self):
        self.location = tempfile.mkdtemp(prefix = 'fclabel.')

    def loc(self, name):
        return os.path.join(self.location, name)

    def writeFile(self, name, contents):
        """Writes contents to a file in this directory and returns its path."""
        path = self.loc(name)
        with open(path, 'w') as f:
            f.write(contents)
        return path

    def remove(self):
        shutil.rmtree(self.location)

    def __del__(self):
        if os.path.isdir(self.location):
            logging.warning('temporary directory ' + self.location +
                            ' not deleted. You probably want to do this'
                            ' manually after looking at its contents.')
