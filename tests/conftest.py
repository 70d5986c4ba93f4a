import textwrap

import pytest


@pytest.fixture
def chapter_content():
    return textwrap.dedent(
        """\
        # Chapter

        <!-- toc -->

        # Header 1

        ## Header 1.1

        # Header 2

        ## Header 2.1

        ## Header 2.2

        ### Header 2.2.1

        """
    )


@pytest.fixture
def expected_toc():
    return (
        "* [Header 1](#header-1)\n"
        "  * [Header 1.1](#header-11)\n"
        "* [Header 2](#header-2)\n"
        "  * [Header 2.1](#header-21)\n"
        "  * [Header 2.2](#header-22)\n"
    )
