"""
Built-in license headers.

Some licenses are templates: tokens such as ``[yyyy]`` or ``<year>`` are
replaced with caller supplied values (usually the copyright year and
holder) to produce the final header text.

Usage:
    header = APACHE_2_0.build_header(year=2024, copyright_owner="Foo Inc.")
    check_headers_recursively(root, predicate, header, 4)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from fileheader.checker import SingleLineChecker
from fileheader.exceptions import MissingTokenValue, UnknownLicense
from fileheader.types import Header



@dataclass(frozen=True)
class LicenseTemplate:
    """A license text plus what to look for when checking for it."""

    spdx_id: str
    text: str
    search_pattern: str
    lines_to_search: int = 10
    tokens: Mapping[str, str] = field(default_factory=dict)

    def render(self, **values: Any) -> str:
        """Substitute token values into the text.

        Only the first occurrence of each token is replaced.
        """
        text = self.text
        for name, token in self.tokens.items():
            if name not in values:
                raise MissingTokenValue(f"{self.spdx_id} needs a value for {name!r}")
            text = text.replace(token, str(values[name]), 1)
        return text

    def build_header(self, **values: Any) -> Header:
        checker = SingleLineChecker(self.search_pattern, self.lines_to_search)
        return Header(checker, self.render(**values))


APACHE_2_0 = LicenseTemplate(
    spdx_id="Apache-2.0",
    text="""Copyright [yyyy] [name of copyright owner]

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.""",
    search_pattern="Apache License, Version 2.0",
    tokens={"year": "[yyyy]", "copyright_owner": "[name of copyright owner]"},
)

MIT = LicenseTemplate(
    spdx_id="MIT",
    text="""MIT License

Copyright (c) <year> <copyright holders>

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.""",
    search_pattern="MIT License",
    tokens={"year": "<year>", "copyright_owner": "<copyright holders>"},
)

BSD_3_CLAUSE = LicenseTemplate(
    spdx_id="BSD-3-Clause",
    text="""Copyright (c) <year> <owner>.

Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are met:

1. Redistributions of source code must retain the above copyright notice,
   this list of conditions and the following disclaimer.

2. Redistributions in binary form must reproduce the above copyright notice,
   this list of conditions and the following disclaimer in the documentation
   and/or other materials provided with the distribution.

3. Neither the name of the copyright holder nor the names of its contributors
   may be used to endorse or promote products derived from this software
   without specific prior written permission.

THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
POSSIBILITY OF SUCH DAMAGE.""",
    search_pattern="Redistribution and use in source and binary forms",
    tokens={"year": "<year>", "copyright_owner": "<owner>"},
)

GPL_3_0_ONLY = LicenseTemplate(
    spdx_id="GPL-3.0-only",
    text="""Copyright (C) <year> <name of author>

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, version 3.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.""",
    search_pattern="GNU General Public License",
    tokens={"year": "<year>", "copyright_owner": "<name of author>"},
)

MPL_2_0 = LicenseTemplate(
    spdx_id="MPL-2.0",
    text="""This Source Code Form is subject to the terms of the Mozilla Public
License, v. 2.0. If a copy of the MPL was not distributed with this
file, You can obtain one at http://mozilla.org/MPL/2.0/.""",
    search_pattern="Mozilla Public",
)

EPL_2_0 = LicenseTemplate(
    spdx_id="EPL-2.0",
    text="""Eclipse Public License - v 2.0

This program and the accompanying materials are made available under the
terms of the Eclipse Public License 2.0 which is available at
http://www.eclipse.org/legal/epl-2.0.""",
    search_pattern="Eclipse Public License - v 2.0",
)

LICENSES: dict[str, LicenseTemplate] = {
    lic.spdx_id: lic
    for lic in (APACHE_2_0, MIT, BSD_3_CLAUSE, GPL_3_0_ONLY, MPL_2_0, EPL_2_0)
}


def get_license(spdx_id: str) -> LicenseTemplate:
    """Look up a built-in license by SPDX id (case-insensitive)."""
    for known_id, lic in LICENSES.items():
        if known_id.lower() == spdx_id.lower():
            return lic
    raise UnknownLicense(f"Unknown license {spdx_id!r}; known: {', '.join(LICENSES)}")
