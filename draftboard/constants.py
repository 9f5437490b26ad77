"""Constants and bundled ranking presets for the draft board."""

DEFAULT_NUM_TEAMS = 10
MAX_NUM_TEAMS = 32

# Key the custom rankings text is stored under
CUSTOM_RANKINGS_KEY = 'customPlayerRankings'

EMPTY_BOARD_MESSAGE = 'Draft board will appear here once rankings are entered.'

# Position prefix -> cell fill colour (hex RGB, no leading '#')
POSITION_COLORS = {
    'WR': '38BDF8',  # sky
    'RB': '34D399',  # emerald
    'TE': 'FBBF24',  # amber
    'QB': 'FB7185',  # rose
}
DEFAULT_POSITION_COLOR = '6B7280'  # gray

PICKED_FONT_COLOR = '9CA3AF'

SLEEPER_PLAYER_LIST = """\
1 Ja'Marr Chase WR
2 Bijan Robinson RB
3 Justin Jefferson WR
4 Saquon Barkley RB
5 Jahmyr Gibbs RB
6 CeeDee Lamb WR
7 Puka Nacua WR
8 Malik Nabers WR
9 Amon-Ra St. Brown WR
10 Ashton Jeanty RB
11 Christian McCaffrey RB
12 Nico Collins WR
13 Brian Thomas Jr. WR
14 De'Von Achane RB
15 Derrick Henry RB
16 A.J. Brown WR
17 Drake London WR
18 Brock Bowers TE
19 Josh Jacobs RB
20 Ladd McConkey WR
21 Jonathan Taylor RB
22 Bucky Irving RB
23 Jaxon Smith-Njigba WR
24 Josh Allen QB
25 Lamar Jackson QB
26 Trey McBride TE
27 Tee Higgins WR
28 Kyren Williams RB
29 Jayden Daniels QB
30 Tyreek Hill WR
"""

YAHOO_PLAYER_LIST = """\
1 Ja'Marr Chase WR
2 Justin Jefferson WR
3 Bijan Robinson RB
4 Saquon Barkley RB
5 CeeDee Lamb WR
6 Jahmyr Gibbs RB
7 Puka Nacua WR
8 Amon-Ra St. Brown WR
9 Malik Nabers WR
10 Christian McCaffrey RB
11 Nico Collins WR
12 Derrick Henry RB
13 Ashton Jeanty RB
14 Brian Thomas Jr. WR
15 De'Von Achane RB
16 A.J. Brown WR
17 Brock Bowers TE
18 Drake London WR
19 Josh Jacobs RB
20 Jonathan Taylor RB
21 Ladd McConkey WR
22 Josh Allen QB
23 Lamar Jackson QB
24 Bucky Irving RB
25 Jaxon Smith-Njigba WR
26 Trey McBride TE
27 Kyren Williams RB
28 Tyreek Hill WR
29 Jayden Daniels QB
30 Tee Higgins WR
"""

ESPN_PLAYER_LIST = """\
1 Ja'Marr Chase WR
2 Bijan Robinson RB
3 Saquon Barkley RB
4 Justin Jefferson WR
5 Jahmyr Gibbs RB
6 CeeDee Lamb WR
7 Christian McCaffrey RB
8 Puka Nacua WR
9 Malik Nabers WR
10 Amon-Ra St. Brown WR
11 Derrick Henry RB
12 Ashton Jeanty RB
13 Nico Collins WR
14 De'Von Achane RB
15 Brian Thomas Jr. WR
16 Josh Jacobs RB
17 A.J. Brown WR
18 Brock Bowers TE
19 Drake London WR
20 Jonathan Taylor RB
21 Bucky Irving RB
22 Ladd McConkey WR
23 Josh Allen QB
24 Lamar Jackson QB
25 Trey McBride TE
26 Kyren Williams RB
27 Jaxon Smith-Njigba WR
28 Jayden Daniels QB
29 Tee Higgins WR
30 James Cook RB
"""
