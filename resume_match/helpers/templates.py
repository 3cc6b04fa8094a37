STRONG_MATCH_MESSAGE = """Strong match ({score}/100). Your resume already covers most of what this job asks for. \
Keep the wording close to the job description and make sure your strongest skills appear near the top."""

MODERATE_GAP_MESSAGE = """Moderate match ({score}/100). Your resume covers a good part of this job's requirements, \
but some important keywords are not there yet. Closing the gaps below should raise your score noticeably."""

SIGNIFICANT_GAP_MESSAGE = """Low match ({score}/100). Your resume is missing many of the keywords this job emphasizes. \
Consider tailoring it to this role and addressing the gaps below before applying."""

NO_GAPS_MESSAGE = """No gaps found: your resume mentions every keyword identified in the job description. \
Keep it concise and make sure each skill is backed by a concrete example."""

MISSING_HEADER = "Keywords to add:"

MISSING_ITEM = """{rank}. "{term}": add evidence of {term} to your resume, such as a project, role or \
certification where you used it."""

MORE_MISSING = "...and {count} more missing keyword{plural} from the job description."
