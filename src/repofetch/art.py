"""Bundled ASCII art."""

from repofetch.models import AsciiArt

GITHUB = AsciiArt(
    text="""\
              @@@@@@@@@@
          @@@@@@@@@@@@@@@@@@
       @@@@@@@@@@@@@@@@@@@@@@@@
     @@@@@  @@@@@@@@@@@@@@  @@@@@
    @@@@@@     @@@@@@@@     @@@@@@
   @@@@@@@                  @@@@@@@
  @@@@@@@                    @@@@@@@
  @@@@@@                      @@@@@@
 @@@@@@@                      @@@@@@@
 @@@@@@@                      @@@@@@@
 @@@@@@@                      @@@@@@@
  @@@@@@@                    @@@@@@@
  @@@@@@@@                  @@@@@@@@
   @@@@  @@@@@          @@@@@@@@@@@
    @@@@@  @@@@        @@@@@@@@@@
     @@@@@             @@@@@@@@@
       @@@@@@@@        @@@@@@@
          @@@@@        @@@@
""",
    max_width=40,
    max_height=20,
)
