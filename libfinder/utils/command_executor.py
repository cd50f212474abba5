import subprocess
from ..cli_logger import logger

def run_shell_command(command, env=None, cwd=None, quiet=False):
    """
    Executes a command and captures its output.

    Args:
        command (list): The command to execute as a list of strings.
        env (dict, optional): A dictionary of environment variables.
        cwd (str, optional): The working directory for the command.
        quiet (bool): If True, a missing executable is not logged.

    Returns:
        A tuple (stdout, stderr, return_code). A command that cannot be started
        yields ("", <error>, -1).
    """
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            env=env,
            check=False,
            cwd=cwd
        )
        return result.stdout, result.stderr, result.returncode

    except FileNotFoundError as e:
        if not quiet:
            logger.error(f"Command not found: {e.filename}")
        return "", str(e), -1
    except OSError as e:
        logger.error(f"Could not run {command[0]}: {e}")
        return "", str(e), -1
