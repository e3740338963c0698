"""
CLI tool for turning a natural-language instruction into a shell command and running it.

The instruction is sent, together with the operating system and working directory,
to an OpenAI-compatible chat-completion API (DeepSeek by default, OpenAI as the
alternative). The first command line of the reply is printed and executed.
"""

__version__ = "0.1.0"
