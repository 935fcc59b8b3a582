from abc import ABC, abstractmethod
from subprocess import CompletedProcess


class ValidatorDriverProtocol(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def validate(self, shader_text: str) -> CompletedProcess[str]:
        """Call validator as an process to validate given preprocessed shader text.

        :param shader_text: Fully preprocessed shader source
        :returns: Finished process, non-zero exit code means shader is invalid (output contains diagnostics)
        """
        ...

    @classmethod
    @abstractmethod
    def is_installed(cls) -> bool:
        """Is given validator driver installed on system?."""
        ...
