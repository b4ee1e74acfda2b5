# Copyright 2025 Bardia Moshiri
# SPDX-License-Identifier: GPL-3.0-or-later
import collections
import logging
import re

import kernelver.helpers.release

# Kernel releases look like "6.7.9-200.fc39.x86_64", only the leading
# major.minor.patch is of interest.
KERNEL_RELEASE_PATTERN = re.compile(r"^([0-9]+\.[0-9]+\.[0-9]+)")
SEGMENT_PATTERN = re.compile(r"[0-9]+")


class InvalidVersionError(ValueError):
    """
    A string could not be parsed as a version.
    """

    def __init__(self, version, context=None):
        self.version = version
        self.context = context
        msg = "invalid version: {}".format(version)
        if context:
            msg = context + ": " + msg
        super().__init__(msg)


class KernelReleaseError(RuntimeError):
    """
    The kernel release source failed to return a release string.
    """

    def __init__(self, cause):
        self.cause = cause
        super().__init__("failed to query kernel release: {}".format(cause))


class Version(collections.namedtuple("Version", ["major", "minor", "patch"])):
    """
    A major.minor.patch version, e.g. the one of the running kernel.
    """
    __slots__ = ()

    @classmethod
    def parse(cls, ver):
        """
        Parse a dotted version string with one to three segments. Missing
        segments default to 0, e.g. "1.2" becomes Version(1, 2, 0).

        :raises InvalidVersionError: on any other input
        """
        parts = ver.split(".")
        if len(parts) > 3:
            raise InvalidVersionError(ver)

        segments = [0, 0, 0]
        for i, part in enumerate(parts):
            if not SEGMENT_PATTERN.fullmatch(part):
                raise InvalidVersionError(ver)
            segments[i] = int(part)
        return cls(*segments)

    @classmethod
    def from_code(cls, code):
        """
        Unpack a version from a LINUX_VERSION_CODE style integer.
        """
        if isinstance(code, bool) or not isinstance(code, int) or \
                not 0 <= code <= 0xffffffff:
            raise ValueError("version code out of range: {!r}".format(code))
        return cls((code >> 16) & 0xff, (code >> 8) & 0xff, code & 0xff)

    @classmethod
    def from_kernel_release(cls, release):
        """
        Extract the version from a kernel release string as reported by
        uname -r, ignoring distribution specific suffixes.
        """
        match = KERNEL_RELEASE_PATTERN.match(release)
        if not match:
            raise InvalidVersionError(release)
        return cls.parse(match.group(1))

    def less(self, other):
        return tuple(self) < tuple(other)

    def unspecified(self):
        return self.major == 0 and self.minor == 0 and self.patch == 0

    def kernel(self):
        """
        Pack the version the way the KERNEL_VERSION() macro does.

        Kernels 4.4 and 4.9 have a SUBLEVEL above 255, which the kernel
        clamps to 255. Major and minor are not clamped, only truncated to
        8 bits, so e.g. 256.256.256 packs to 255.
        """
        return ((self.major & 0xff) << 16) | ((self.minor & 0xff) << 8) | \
            min(self.patch, 255)

    def __str__(self):
        return "v{}.{}.{}".format(self.major, self.minor, self.patch)


new_version = Version.parse
new_version_from_code = Version.from_code
new_version_from_kernel_release = Version.from_kernel_release


def kernel_release(source=None):
    """
    Get the raw release string of the running kernel.

    :param source: callable without arguments returning the release,
                   defaults to kernelver.helpers.release.uname_release
    :raises KernelReleaseError: when the source fails
    """
    if source is None:
        source = kernelver.helpers.release.uname_release
    try:
        release = source()
    except Exception as e:
        raise KernelReleaseError(e) from e
    if not release:
        raise KernelReleaseError("empty release string")
    logging.debug("Kernel release: " + release)
    return release


def kernel_version(source=None):
    """
    Get the version of the running kernel. Nothing is cached, every call
    queries the source again.
    """
    release = kernel_release(source)
    try:
        return Version.from_kernel_release(release)
    except InvalidVersionError as e:
        raise InvalidVersionError(
            release, "failed to parse kernel release") from e
