"""
Built-in sample schedule, used by `interview-analytics sample` and
`interview-analytics analyze --sample`.
"""

from __future__ import annotations

SAMPLE_SCHEDULE = """\
Candidate ID: C14954072
Date: 2025-05-21
Time:   16:00 - 17:00  IST
Candidate ID: C11776200
Date: 2025-07-19
Time:   11:00 - 12:00  IST
Candidate ID: C16377895
Date: 2025-07-23
Time:   17:00 - 18:00  IST
Cancelled
Candidate ID: C16585086
Date: 2025-07-26
Time:   14:00 - 15:00  IST
Candidate ID: C10980940
Date: 2025-08-12
Time:   19:00 - 20:00  IST
Candidate ID: C14868460
Date: 2025-08-21
Time:   16:00 - 17:00  IST
Candidate ID: C16610239
Date: 2025-09-20
Time:   20:00 - 21:00  IST
Candidate ID: C16588635
Date: 2025-10-08
Time:   16:00 - 17:00  IST
Candidate ID: C06738172
Date: 2025-10-13
Time:   18:00 - 19:00  IST
Candidate ID: C17180244
Date: 2025-10-16
Time:   17:00 - 18:00  IST
Candidate ID: C09408711
Date: 2025-11-01
Time:   10:00 - 11:00  IST
Candidate ID: C18808222
Date: 2025-11-03
Time:   15:00 - 16:00  IST
Candidate ID: C18461824
Date: 2025-11-07
Time:   16:00 - 17:00  IST
"""

__all__ = ["SAMPLE_SCHEDULE"]
