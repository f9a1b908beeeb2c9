"""
SSH client launcher
"""
import signal
import subprocess
from typing import List

from ..core.constants import DEFAULT_SSH_BINARY
from ..core.exceptions import LaunchError
from ..core.logging import get_logger
from ..domain.connections.models import ConnectionRecord

logger = get_logger(__name__)


class SshLauncher:
    """Start the system ssh client against a saved connection"""
    
    def __init__(self, ssh_binary: str = DEFAULT_SSH_BINARY):
        self.ssh_binary = ssh_binary
    
    def build_command(self, record: ConnectionRecord) -> List[str]:
        """Command line for an interactive session"""
        return [self.ssh_binary, record.target]
    
    def connect(self, record: ConnectionRecord) -> subprocess.Popen:
        """
        Start ssh with the terminal's stdin/stdout/stderr attached directly.
        
        Returns as soon as the process has started; the exit status is
        never inspected here.
        
        Raises:
            LaunchError: If the ssh binary can't be executed
        """
        command = self.build_command(record)
        logger.debug("Launching %s", command)
        try:
            return subprocess.Popen(command)
        except OSError as e:
            raise LaunchError(f"Failed to start '{self.ssh_binary}': {e}") from e
    
    def wait(self, process: subprocess.Popen) -> None:
        """
        Block until the session ends so the terminal stays with ssh.
        
        SIGINT is ignored meanwhile; Ctrl-C belongs to the remote session.
        """
        previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
        try:
            process.wait()
        finally:
            signal.signal(signal.SIGINT, previous)
        logger.debug("ssh session ended")
