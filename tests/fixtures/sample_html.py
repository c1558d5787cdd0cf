"""Sample editor HTML documents."""

RESUME_HTML = """
<h1>Jane Doe</h1>
<p>Seattle, WA | <a href="mailto:jane@example.com">jane@example.com</a></p>
<h2>Experience</h2>
<h3>Senior Engineer, <em>Acme Corp</em></h3>
<ul>
  <li><p>Led migration of <strong>12 services</strong> to Kubernetes</p></li>
  <li><p>Mentored four engineers</p>
    <ul>
      <li>Ran weekly design reviews</li>
    </ul>
  </li>
</ul>
<h2>Education</h2>
<p>B.S. Computer Science</p>
<p></p>
<ol>
  <li>Algorithms</li>
  <li>Distributed Systems</li>
</ol>
"""

COVER_LETTER_HTML = """
<div class="letter">
  <p>Dear Hiring Manager,</p>
  <p>I am excited to apply for the <strong>Platform Engineer</strong> role.<br>
  My portfolio is at <a href="https://jane.dev"></a>.</p>
  <p>Sincerely,<br>Jane Doe</p>
</div>
"""
